"""Allow running gitprompt as ``python -m gitprompt``."""

from gitprompt.cli import main

if __name__ == "__main__":
    main()
