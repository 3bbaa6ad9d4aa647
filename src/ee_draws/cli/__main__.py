from ee_draws.cli.main import main

main()
