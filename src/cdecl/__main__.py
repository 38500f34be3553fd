from cdecl.cli import main

main()
