from fxbridge.cli.main import main

main()
