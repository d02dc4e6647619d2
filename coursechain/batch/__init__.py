"""Contract minting course certificates singly or in batches, with its storage, events and errors."""