from cqbot.app import main

main()
