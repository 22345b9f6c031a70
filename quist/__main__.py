from quist.cli.main import main

main()
