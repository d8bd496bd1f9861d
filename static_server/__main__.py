from static_server.app import main


main()
