"""Entry point for 'python -m genpass' command.

This module allows the GenPass CLI to be invoked using
'python -m genpass'.
"""

from genpass.cli import main

if __name__ == "__main__":
    main()
