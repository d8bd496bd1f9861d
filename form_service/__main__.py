from form_service.api import main


main()
