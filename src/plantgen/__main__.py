from plantgen.cli import main

raise SystemExit(main())
