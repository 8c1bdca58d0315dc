"""Allow ``python -m i18n_typesafe``."""

from i18n_typesafe.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
