"""AI photo editor: RPC backend, client SDK and CLI"""
