import sys

from tictactoe_local.app import main

if __name__ == '__main__':
    sys.exit(main())
