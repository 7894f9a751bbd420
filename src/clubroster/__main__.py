from clubroster.cli import main

raise SystemExit(main())
