from photon_cli.main import main

main()
