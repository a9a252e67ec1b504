from eda_tlbx.cli import main


raise SystemExit(main())
