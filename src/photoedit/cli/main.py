"""Photo editor CLI entry point"""

import click

from .command import init, start, stop


@click.group(
    name="photoedit",
    help="AI photo editor - backend server management",
)
def main():
    """Main CLI entry point"""
    pass


main.add_command(init)
main.add_command(start)
main.add_command(stop)


if __name__ == "__main__":
    main()
