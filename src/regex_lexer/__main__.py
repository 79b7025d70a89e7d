import sys

from regex_lexer.cli import main

sys.exit(main())
