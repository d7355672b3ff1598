from moons.generate_moon import main

if __name__ == "__main__":
    main()
