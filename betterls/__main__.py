from betterls.cli import main

main()
