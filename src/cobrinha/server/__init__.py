"""Browser front end: FastAPI app serving the page and the play socket."""
