from openpr.cli.cli import main

main()
