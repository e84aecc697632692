import sys

from myshell.cli_shell import main

if __name__ == "__main__":
    sys.exit(main())
