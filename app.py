from src.pokemon_shiritori.app.entrypoint import main

main()
