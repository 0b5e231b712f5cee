from create_loom.cli import main

main()
