from __future__ import annotations

from splitshare.demo import main
from splitshare.logging import configure_logging

if __name__ == "__main__":
    configure_logging()
    main()
