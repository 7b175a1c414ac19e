from secrets_app import create_app

app = create_app()

if __name__ == "__main__":
    port = app.config["PORT"]
    print(f"[Server] Running on port {port}")
    app.run(port=port)
