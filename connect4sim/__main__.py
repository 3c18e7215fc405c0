from connect4sim.cli import main

main()
