from urlshort.cli import main

main()
