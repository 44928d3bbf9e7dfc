from orgchart_desktop.runtime.cli import main

raise SystemExit(main())
