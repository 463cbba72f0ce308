from pico_cart.app import create_app

app = create_app("application.yaml", verbose=True)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
