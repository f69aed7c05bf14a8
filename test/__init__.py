from os.path import dirname

data_dir = f'{dirname(__file__)}/data'
