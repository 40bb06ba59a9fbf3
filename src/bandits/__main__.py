from bandits.main import main

main()
