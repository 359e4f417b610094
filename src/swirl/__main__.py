from swirl.app import main

main()
