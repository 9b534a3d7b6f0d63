from term_edit.cli.main import main

main()
