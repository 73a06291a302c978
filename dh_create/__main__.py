from dh_create.pipeline import main

main()
