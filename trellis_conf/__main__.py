from trellis_conf.cli import app

app(prog_name="trellis-conf")
