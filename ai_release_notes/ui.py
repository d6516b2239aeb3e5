import typer
from rich.console import Console
from rich.rule import Rule


class CLI:
	def __init__(self):
		self.console = Console()

	def show_text(self, text: str) -> None:
		self.console.print(text, markup=False, highlight=False)

	def show_release_notes(self, heading: str, release_notes: str) -> None:
		"""Show release notes between two rules.

		The notes are printed verbatim so they can be copied.

		Args:
			heading (str): The heading above the release notes.
			release_notes (str): The release notes to show (in markdown format).
		"""
		self.console.print(Rule(heading, characters="="))
		self.show_text(release_notes)
		self.console.print(Rule(characters="="))

	def show_error(self, message: str) -> None:
		"""Show a red error message, to stderr.

		Args:
			message (str): The error message to show.
		"""
		typer.secho(message, err=True, fg=typer.colors.RED)

	def show_warning(self, message: str) -> None:
		typer.secho(message, fg=typer.colors.YELLOW)

	def show_success(self, message: str) -> None:
		"""Show a green success message, to stdout.

		Args:
			message (str): The success message to show.
		"""
		typer.secho(message, fg=typer.colors.GREEN)
