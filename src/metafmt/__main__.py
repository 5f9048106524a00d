from metafmt.main import main

main()
