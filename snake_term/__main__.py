from __future__ import annotations

from snake_term.main import main

raise SystemExit(main())
