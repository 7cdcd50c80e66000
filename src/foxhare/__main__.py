"""Command-line interface."""
from foxhare.main import main

if __name__ == "__main__":
    main()
