from category_api.api.app import main

main()
