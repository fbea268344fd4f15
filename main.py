# main.py
# Run from the project root: python main.py [--seed 1] [--no-mega]

from jungle_gun.game import main

if __name__ == "__main__":
    main()
