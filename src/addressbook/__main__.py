import sys

from src.addressbook.cli import main

if __name__ == "__main__":
    sys.exit(main())
