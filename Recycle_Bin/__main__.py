import sys

import Recycle_Bin.cli.commands as commands_cli


def main():
    sys.exit(commands_cli.run())


if __name__ == "__main__":
    main()
