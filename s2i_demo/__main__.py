from s2i_demo.main import run

if __name__ == "__main__":
    run()
