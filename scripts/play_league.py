#!/usr/bin/env python3
"""Play the motocross fantasy league from a source checkout."""

from mxfantasy.game import main

if __name__ == "__main__":
    main()
