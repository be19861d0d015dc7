from pattern_catalog.cli import main

main(prog_name="pattern-catalog")
