from pgen.cli.app import main

main()
