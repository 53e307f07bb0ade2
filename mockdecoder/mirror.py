import zmq
import zmq.asyncio


class Mirror:
    """Republish emitted passing lines on a ZMQ PUB socket."""

    def __init__(self, endpoint: str, context=None):
        self.endpoint = endpoint
        self.context = context or zmq.asyncio.Context.instance()
        self.socket = self.context.socket(zmq.PUB)
        self.socket.bind(endpoint)
        print(f"[mirror] publishing on {endpoint}")

    async def publish(self, line: str):
        """Best effort: a failed publish is reported, never raised to the session."""
        try:
            await self.socket.send_string(line)
        except zmq.ZMQError as e:
            print(f"[mirror] publish failed: {e}")

    def close(self):
        self.socket.close(linger=0)
