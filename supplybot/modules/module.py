class BotModule(object):
  def __init__(self, bot):
    self.bot = bot

  def __getattr__(self, name):
    return getattr(self.bot, name)

  async def on_step(self, iteration):
    raise NotImplementedError("You must implement this function")

  # Some other methods that are available
  async def on_start(self):
    pass

  async def on_end(self, game_result):
    pass
