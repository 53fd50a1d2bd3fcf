"""01. Ask (library usage).

Resolve configuration from the environment and ``.env``, send one prompt,
and inspect the reply and token usage without going through the CLI.
"""

from chatgpt_cli import ChatClient, load_config

config = load_config()
client = ChatClient(config)

completion = client.chat("What is the capital of France? Reply in one sentence.")

print("Response:", completion.text)
print(f"Tokens in: {completion.usage.input_tokens}, out: {completion.usage.output_tokens}")
