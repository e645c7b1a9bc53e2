from spotctl.cli import run

run()
