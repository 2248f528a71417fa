from garbagestream.cli import main

raise SystemExit(main())
