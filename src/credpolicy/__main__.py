"""Entry point for 'python -m credpolicy' command."""

from credpolicy.cli import main

if __name__ == "__main__":
    main()
