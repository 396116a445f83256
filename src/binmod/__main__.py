from binmod.cli import main

raise SystemExit(main())
