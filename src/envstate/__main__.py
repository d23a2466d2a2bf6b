from envstate.cli import main

main(prog_name="envstate")
