from clean_lint.cli import cli

if __name__ == "__main__":
    cli(prog_name="clean")
