"""Development entrypoint delegating to the application package."""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from ascendia.main import app


if __name__ == "__main__":
    app.logger.info("Ascendia backend running on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=False)
