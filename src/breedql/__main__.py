from breedql.adapters.ariadne.app import main

main()
