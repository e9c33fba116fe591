from autohide.cli import main

main()
