"""
Entry point for running the simulation as a module: python -m monty_hall
"""
from .cli import main

if __name__ == '__main__':
    main()
