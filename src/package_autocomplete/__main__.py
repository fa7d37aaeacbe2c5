from package_autocomplete.lsp.server import main

main()
