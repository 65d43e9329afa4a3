from stylegate.cli.main import run

run()
