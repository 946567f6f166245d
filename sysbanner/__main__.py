from sysbanner.banner import main

raise SystemExit(main())
