from app import create_app

app = create_app()

if __name__ == "__main__":
    from seeder.seed import run_seed

    run_seed(app)
    app.run(host="0.0.0.0", port=5000, debug=True)
