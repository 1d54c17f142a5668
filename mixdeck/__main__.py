from mixdeck.interfaces.cli.cli_main import main

raise SystemExit(main())
