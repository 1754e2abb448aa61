from tooltip_kit.cli import main

raise SystemExit(main())
