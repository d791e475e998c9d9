from chapteredit.app import main

main()
