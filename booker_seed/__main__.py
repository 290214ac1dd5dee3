from booker_seed.main import run

run()
