from minic_lexer.cli import main

raise SystemExit(main())
