from chatgpt_cli.cli import main

raise SystemExit(main())
