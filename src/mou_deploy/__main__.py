from mou_deploy.cli import main

main()
