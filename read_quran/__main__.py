from read_quran.cli import main

raise SystemExit(main())
