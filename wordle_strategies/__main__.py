from wordle_strategies.main import main

main()
