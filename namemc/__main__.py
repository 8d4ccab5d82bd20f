from namemc.cli import main

raise SystemExit(main())
