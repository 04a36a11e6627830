from preview_search.cli import app

if __name__ == "__main__":
    app()
