#!/usr/bin/env python3
from tinysite.cli import main

if __name__ == "__main__":
    main()
