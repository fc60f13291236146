from cipher_bench.cli import default_main

if __name__ == "__main__":
    default_main()
