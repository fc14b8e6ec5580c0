from segregatezeros.cli import main

main(prog_name='segregate-zeros')
