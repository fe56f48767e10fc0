from kvim.cli import main

raise SystemExit(main())
