from hammer import create_app
from hammer.extensions import get_services
from hammer.utils import logger

app = create_app()

# Run the application if the script is executed directly
if __name__ == "__main__":
    port = app.config["PORT"]
    logger.info(f"my-assignment-12-server-running {port}")
    with get_services(app).database:
        app.run(host="0.0.0.0", port=port, debug=False)
