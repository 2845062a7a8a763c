from adjgraph.cli import main

main()
