from detector_relay.main import app, run  # noqa: F401

if __name__ == "__main__":
    # HOST / PORT come from the environment (PORT defaults to 3000)
    run()
