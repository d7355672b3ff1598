from moons.spacing import InvalidParameterError, linspace
from moons.generate_moon import MoonsDataset, generate_moons_dataset

__all__ = ["InvalidParameterError", "linspace", "MoonsDataset", "generate_moons_dataset"]
