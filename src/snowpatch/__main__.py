from snowpatch.cli import main

main()
