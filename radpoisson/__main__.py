from radpoisson.main import main

main()
