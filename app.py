from shutterlab.kernel.system.logging_config import setup_logging


def start_app() -> None:
    from shutterlab.presentation.app import main

    main()


# Run with: streamlit run app.py
if __name__ == "__main__":
    setup_logging()
    start_app()
