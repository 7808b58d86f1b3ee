"""Allow ``python -m skillreg``."""

from skillreg.cli.main import main

raise SystemExit(main())
