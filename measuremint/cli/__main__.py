from measuremint.cli.main import main

main()
