from loom.tui.demo import main

main()
